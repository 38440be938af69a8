# -*- coding: utf-8 -*-
"""Tips: built-in wellness tips and the user's saved tips."""
