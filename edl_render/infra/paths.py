# -*- coding: utf-8 -*-
"""
Paths utilities for the FFmpeg binary
"""

import os
import shutil
from typing import Optional


def ffmpeg_bin(user_path: Optional[str] = None) -> str:
    """Resolve o caminho para o binário do FFmpeg"""
    if user_path and os.path.exists(user_path):
        return os.path.abspath(user_path)
    return shutil.which("ffmpeg") or "ffmpeg"  # assume no PATH
