#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Hand strength evaluation
"""

from .hand_category import HandCategory, CATEGORY_SCALE
from .hand_evaluator import HandEvaluator, evaluate_hand

__all__ = [
    'HandCategory', 'CATEGORY_SCALE',
    'HandEvaluator', 'evaluate_hand',
]
