# -*- coding: utf-8 -*-
"""Medications: schedules and dose tracking."""
