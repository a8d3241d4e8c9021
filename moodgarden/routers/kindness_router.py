# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from moodgarden.models.database import get_db
from moodgarden.schemas.kindness_schemas import KindnessMessageCreate, KindnessMessageOut
from moodgarden.services.kindness_service import KindnessExchange
from moodgarden.services.wellness_prompt_service import WellnessPromptGenerator, get_prompt_generator
from moodgarden.stores.kindness_message_store import KindnessMessageStore
from moodgarden.utils.rate_limit_utils import limiter, KINDNESS_POST_RATE

router = APIRouter(prefix="/api/kindness-messages", tags=["Kindness Exchange"])


@router.post("", response_model=KindnessMessageOut)
@limiter.limit(KINDNESS_POST_RATE)
def create_kindness_message(
    request: Request,
    payload: KindnessMessageCreate,
    db: Session = Depends(get_db),
    generator: WellnessPromptGenerator = Depends(get_prompt_generator)
):
    exchange = KindnessExchange(KindnessMessageStore(db), generator)
    return exchange.submit_message(payload.message)


@router.get("/random", response_model=KindnessMessageOut)
def random_kindness_message(
    db: Session = Depends(get_db),
    generator: WellnessPromptGenerator = Depends(get_prompt_generator)
):
    """Hands out one unused message; it will not be handed out again."""
    exchange = KindnessExchange(KindnessMessageStore(db), generator)
    return exchange.get_random_message()
