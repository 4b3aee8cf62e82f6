"""
Helpers for building alert headers.

Front-end clients read ``X-<app>-alert`` / ``X-<app>-params`` from
successful responses and ``X-<app>-error`` / ``X-<app>-params`` from
failed ones to display notifications.  When translation is enabled the
alert is a message key (``<app>.<entity>.created``) instead of an
English sentence.
"""

from typing import Dict

from .config import settings


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": param,
    }


def create_entity_creation_alert(
    application_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.created"
    else:
        message = f"A new {entity_name} is created with identifier {param}"
    return create_alert(application_name, message, param)


def create_entity_update_alert(
    application_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.updated"
    else:
        message = f"A {entity_name} is updated with identifier {param}"
    return create_alert(application_name, message, param)


def create_entity_deletion_alert(
    application_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.deleted"
    else:
        message = f"A {entity_name} is deleted with identifier {param}"
    return create_alert(application_name, message, param)


def create_failure_alert(
    application_name: str, enable_translation: bool, entity_name: str, error_key: str, default_message: str
) -> Dict[str, str]:
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        f"X-{application_name}-error": message,
        f"X-{application_name}-params": entity_name,
    }


def creation_alert(entity_name: str, entity_id: int) -> Dict[str, str]:
    """Creation alert for this application with translation disabled."""
    return create_entity_creation_alert(settings.application_name, False, entity_name, str(entity_id))


def update_alert(entity_name: str, entity_id: int) -> Dict[str, str]:
    return create_entity_update_alert(settings.application_name, False, entity_name, str(entity_id))


def deletion_alert(entity_name: str, entity_id: int) -> Dict[str, str]:
    return create_entity_deletion_alert(settings.application_name, False, entity_name, str(entity_id))
