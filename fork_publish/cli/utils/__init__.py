"""CLI utility functions"""

from .interactive import ConfirmPrompt
from .output import (
    console,
    format_checklist_report,
    format_publish_report,
    show_next_steps,
    show_post_publish_instructions,
    print_error,
)

__all__ = [
    'ConfirmPrompt',
    'console',
    'format_checklist_report',
    'format_publish_report',
    'show_next_steps',
    'show_post_publish_instructions',
    'print_error',
]
