# -*- coding: utf-8 -*-
"""Check-ins: daily mood, energy and symptom log."""
