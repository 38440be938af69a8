# -*- coding: utf-8 -*-
"""Vitals: blood pressure, heart rate, weight and other readings."""
