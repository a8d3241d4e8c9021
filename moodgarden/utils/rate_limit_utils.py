# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from slowapi import Limiter
from slowapi.util import get_remote_address

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

limiter = Limiter(key_func=get_remote_address)

KINDNESS_POST_RATE = os.getenv("KINDNESS_POST_RATE", "10/minute")
