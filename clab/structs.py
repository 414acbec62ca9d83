#!/usr/bin/env python3
"""
Public Access point for clab Structures
"""
from __future__ import annotations

from clab._structs.flag_spec import FlagSpec, TagSpec
from clab._structs.evaluation import Evaluation, FlagRecord
