"""
Workflow Client

Forwards chat and recipe-parsing requests to the n8n webhook that runs the
conversational AI. The workflow itself lives in n8n; this module only
speaks its JSON contract.
"""

import logging
from datetime import datetime, timezone

import requests

logger = logging.getLogger(__name__)

FALLBACK_CHAT_RESPONSE = 'Sorry, I could not process your message at this time.'


class WorkflowError(Exception):
    """Raised when the workflow engine is unreachable or returns an error."""
    pass


def default_recipe_structure():
    """Empty recipe returned when the workflow produces nothing usable."""
    return {
        'title': '',
        'description': '',
        'ingredients': [],
        'instructions': [],
        'prep_time': None,
        'cook_time': None,
        'servings': None,
        'difficulty': None,
        'cuisine': None,
        'dietary_tags': [],
    }


class WorkflowClient:
    """Posts typed payloads to the n8n webhook."""

    def __init__(self, webhook_url, timeout=30):
        self.webhook_url = webhook_url
        self.timeout = timeout

    def _post(self, payload):
        if not self.webhook_url:
            raise WorkflowError('Workflow webhook URL is not configured')

        payload = dict(payload, timestamp=datetime.now(timezone.utc).isoformat())
        try:
            response = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Workflow request failed (%s): %s", payload['type'], e)
            raise WorkflowError('Failed to reach AI workflow') from e

        if not response.ok:
            logger.error("Workflow returned %s for %s", response.status_code, payload['type'])
            raise WorkflowError(f"Workflow error: {response.status_code} {response.reason}")

        try:
            return response.json()
        except ValueError as e:
            raise WorkflowError('Workflow returned invalid JSON') from e

    def process_chat_message(self, message, context=None):
        """Send a chat message and return the AI's reply text."""
        result = self._post({
            'message': message,
            'context': context or {},
            'type': 'chat_message',
        })
        if not isinstance(result, dict):
            return FALLBACK_CHAT_RESPONSE
        return result.get('aiResponse') or FALLBACK_CHAT_RESPONSE

    def parse_recipe(self, recipe_text, user_preferences=None):
        """Ask the workflow to structure free recipe text."""
        result = self._post({
            'recipeText': recipe_text,
            'userPreferences': user_preferences or {},
            'type': 'recipe_parsing',
        })
        if not isinstance(result, dict):
            return default_recipe_structure()
        return result.get('parsedRecipe') or default_recipe_structure()
