# -*- coding: utf-8 -*-
"""AlagApp health-tracking backend."""

__version__ = "0.1.0"
