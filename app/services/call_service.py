"""
Voice-call registration with the Retell call provider.

The provider runs the call; we only register a web call for an interviewer's
agent and hand the registration payload back to the client.
"""
import logging
from typing import Any, Dict, Optional

import requests

from app.core import config
from app.core.errors import NotFoundError, UpstreamFailureError, AppError
from app.core.logging_config import sanitize_log_data
from app.services.interviewer_service import find_interviewer

logger = logging.getLogger(__name__)


class InterviewerNotConfiguredError(AppError):
    """Interviewer exists but has no voice agent assigned."""
    code = "INTERVIEWER_NOT_CONFIGURED"
    status_code = 500
    default_message = "Interviewer not properly configured"


class CallClient:
    def __init__(self, api_key: str, base_url: str = "https://api.retellai.com", timeout: int = 30):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls) -> "CallClient":
        """
        Raises:
            ConfigurationError: if RETELL_API_KEY is missing
        """
        settings = config.require_settings("RETELL_API_KEY")
        return cls(api_key=settings["RETELL_API_KEY"], base_url=config.RETELL_BASE_URL)

    def create_web_call(self, agent_id: str, dynamic_variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Register a web call for an agent.

        Raises:
            UpstreamFailureError: on transport errors or a non-2xx response
        """
        payload = {"agent_id": agent_id}
        if dynamic_variables:
            payload["retell_llm_dynamic_variables"] = dynamic_variables

        try:
            r = requests.post(
                f"{self.base_url}/v2/create-web-call",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Call provider request failed: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to register call") from e

        if r.status_code >= 300:
            logger.error(f"Call provider error: status={r.status_code}, body={r.text[:500]}")
            raise UpstreamFailureError("Failed to register call")

        return r.json()


def get_call_client() -> CallClient:
    """Call client dependency."""
    return CallClient.from_config()


def register_call(db, client: CallClient, interviewer_id: str, dynamic_data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Register a voice call with the interviewer's agent.

    Raises:
        NotFoundError: interviewer missing or inactive
        InterviewerNotConfiguredError: interviewer has no agent id
        UpstreamFailureError: provider call failed
    """
    logger.info(f"Registering call: interviewer_id={interviewer_id}, dynamic_data={sanitize_log_data(dynamic_data or {})}")
    interviewer = find_interviewer(db, interviewer_id)
    if not interviewer:
        logger.error(f"Interviewer not found: interviewer_id={interviewer_id}")
        raise NotFoundError("Interviewer not found")

    if not interviewer.agent_id:
        logger.error(f"Interviewer agentId not configured: interviewer_id={interviewer_id}")
        raise InterviewerNotConfiguredError()

    response = client.create_web_call(interviewer.agent_id, dynamic_data)
    logger.info(f"Call registered: interviewer_id={interviewer_id}, call_id={response.get('call_id')}")
    return response
