# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


class MoodGardenError(Exception):
    """Base class for every error raised by this service."""


class ValidationError(MoodGardenError):
    """Malformed or missing input. Surfaced to the client as a 400."""


class NotFoundError(MoodGardenError):
    """A record vanished between lookup and update (e.g. a concurrent clear)."""


class ExternalServiceError(MoodGardenError):
    """The AI text endpoint failed. Always recovered with fallback text."""


class StorageError(MoodGardenError):
    """The persistence layer failed. Surfaced as a 500, never retried."""
