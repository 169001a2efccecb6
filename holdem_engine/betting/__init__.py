#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pot construction and distribution
"""

from .side_pot import SidePot, calculate_side_pots, total_in_pots
from .pot_manager import PotAward, PotDistributor, split_amount, summarize_awards

__all__ = [
    'SidePot', 'calculate_side_pots', 'total_in_pots',
    'PotAward', 'PotDistributor', 'split_amount', 'summarize_awards',
]
