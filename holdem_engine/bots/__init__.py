#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Bots: the decision sources seated at the table
"""

from .base import Bot, Decision
from .random_bot import RandomBot

__all__ = ['Bot', 'Decision', 'RandomBot']
