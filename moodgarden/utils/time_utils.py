# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1)
MS_PER_DAY = 86_400_000


def utc_now() -> datetime:
    """Naive UTC timestamp, the form every column in this project stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def day_index(moment: datetime) -> int:
    """
    Calendar day number of a timestamp: milliseconds since the epoch
    divided by one day, floored. Days roll over at midnight UTC.
    """
    elapsed = as_naive_utc(moment) - EPOCH
    return (elapsed // timedelta(milliseconds=1)) // MS_PER_DAY


def days_between(earlier: datetime, later: datetime) -> int:
    return day_index(later) - day_index(earlier)
