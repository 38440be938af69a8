# -*- coding: utf-8 -*-
"""Auth: registration, login and session tokens."""
