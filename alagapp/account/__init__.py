# -*- coding: utf-8 -*-
"""Account: permanent account deletion."""
