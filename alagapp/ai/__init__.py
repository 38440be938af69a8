# -*- coding: utf-8 -*-
"""AI: nutrition estimates, meal analysis and the health assistant."""
