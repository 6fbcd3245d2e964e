"""Emotion log endpoints and the user's custom logging choices."""

import logging

from eunoia.client.base import BaseApiClient, parse_model
from eunoia.models.emotion import (
    EmotionLog,
    EmotionLogInput,
    OptionType,
    UserOptionInput,
    UserOptions,
)

logger = logging.getLogger(__name__)


class EmotionApiClient(BaseApiClient):
    """Mood logging on the services backend.

    All methods raise ``AuthenticationRequired`` when no usable token is
    stored and ``ApiError`` on any other failure.
    """

    async def list_logs(self) -> list[EmotionLog]:
        """Fetch the user's emotion logs in backend order.

        A body that is not a list is treated as no logs.
        """
        data = await self.request_json("GET", "/emotion", base_url=self._config.services_base_url)
        if not isinstance(data, list):
            logger.warning(f"Unexpected emotion log payload type: {type(data).__name__}")
            return []
        return [parse_model(EmotionLog, item) for item in data]

    async def log_emotion(self, entry: EmotionLogInput) -> None:
        await self.request_json(
            "POST", "/emotion", base_url=self._config.services_base_url, json=entry.model_dump()
        )
        logger.info(f"Logged mood {entry.mood!r} at intensity {entry.intensity}")

    async def get_user_options(self) -> UserOptions:
        data = await self.request_json(
            "GET", "/user-options", base_url=self._config.services_base_url
        )
        return parse_model(UserOptions, data if isinstance(data, dict) else {})

    async def add_user_option(self, option_type: OptionType, value: str) -> UserOptions:
        """Save a custom location, company or activity and return the updated set.

        Raises:
            pydantic.ValidationError: ``value`` is blank.
        """
        option = UserOptionInput(type=option_type, value=value)
        await self.request_json(
            "POST",
            "/user-options",
            base_url=self._config.services_base_url,
            json=option.model_dump(),
        )
        return await self.get_user_options()
