"""
Submission Collaborators

Consume a fully validated set of form values after a successful submit.
The form coordinator invokes the handler exactly once per successful
submit and ignores its return value.

Supported actions:
- "log": Log the submitted values (default)
- "webhook:<url>": POST the values as JSON to a URL
- any callable accepting the values mapping
"""

import json
import logging
from typing import Any, Callable, Dict, Union

import httpx

from fieldkit.config.settings import SUBMIT_ACTION, SUBMIT_WEBHOOK_TIMEOUT

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[Dict[str, str]], Any]


def execute_action(action: str, values: Dict[str, str], verbose: bool = False) -> Dict[str, Any]:
    """
    Execute a named submission action.

    Returns:
        dict: Result data from the action
    """
    if action.startswith("webhook:"):
        url = action[len("webhook:"):]
        return send_webhook(url, values, verbose)

    if action != "log":
        logger.warning(f"SUBMIT | Unknown action '{action}', falling back to log")

    logger.info(f"SUBMIT | Form submitted: {json.dumps(values, indent=2, ensure_ascii=False)}")
    return {"action": "log", "status": "success", "data": dict(values)}


def send_webhook(url: str, values: Dict[str, str], verbose: bool = False) -> Dict[str, Any]:
    """POST submitted values to a webhook URL."""
    try:
        response = httpx.post(url, json=values, timeout=SUBMIT_WEBHOOK_TIMEOUT)
        response.raise_for_status()

        if verbose:
            logger.info(f"SUBMIT | Webhook response: {response.status_code}")

        return {
            "action": "webhook",
            "status": "success",
            "status_code": response.status_code,
            "response": response.text[:500],
        }
    except httpx.HTTPError as e:
        logger.error(f"SUBMIT | Webhook error: {e}")
        return {"action": "webhook", "status": "error", "error": str(e)}


def make_submit_handler(
    action: Union[str, SubmitHandler, None] = None,
    verbose: bool = False,
) -> SubmitHandler:
    """
    Build a submit handler from an action name or callable.

    Args:
        action: "log", "webhook:<url>", a callable, or None for SUBMIT_ACTION
        verbose: Enable verbose logging

    Returns:
        Callable taking the submitted values
    """
    if action is None:
        action = SUBMIT_ACTION
    if callable(action):
        return action

    def handler(values: Dict[str, str]) -> Dict[str, Any]:
        return execute_action(action, values, verbose)

    return handler
