# message_service.py

import sys
import time
from collections import deque

from config import MESSAGE_TYPES


class MessageService:
    """
    Rolling log of timestamped viewer messages.

    Every info/warning/error message is queued for the on-screen message
    panel and echoed to the console (errors to stderr). Debug messages go to
    the console only, and only when `verbose` is set.

    Attributes:
      - max_messages (int): queue length
      - messages (deque): (timestamp, type, message) tuples, oldest first
      - message_types (dict): prefix and color per type, from MESSAGE_TYPES
    """
    def __init__(self, max_messages=3, verbose=False):
        self.max_messages = max_messages
        self.verbose = verbose
        self.messages = deque(maxlen=max_messages)
        self.message_types = MESSAGE_TYPES

    def log(self, message_type, message):
        if message_type not in self.message_types:
            raise ValueError(f"Unknown message type '{message_type}'")
        self.messages.append((time.strftime("%H:%M"), message_type, message))

        prefix = self.message_types[message_type]["prefix"]
        stream = sys.stderr if message_type == "error" else sys.stdout
        print(f"{prefix}: {message}" if prefix else f" {message}", file=stream)

    def log_info(self, message):
        self.log("info", message)

    def log_warning(self, message):
        self.log("warning", message)

    def log_error(self, message):
        self.log("error", message)

    def log_debug(self, message):
        if self.verbose:
            print(f"DEBUG: {message}")

    def get_messages(self):
        """List of (timestamp, type, message), oldest first."""
        return list(self.messages)

    def get_formatted_messages(self):
        """
        Returns:
          - list of display strings, "[HH:MM] PREFIX: text" (no prefix for info)
          - list of the matching colors
        """
        formatted = []
        colors = []
        for timestamp, msg_type, message in self.messages:
            style = self.message_types[msg_type]
            if style["prefix"]:
                formatted.append(f"[{timestamp}] {style['prefix']}: {message}")
            else:
                formatted.append(f"[{timestamp}] {message}")
            colors.append(style["color"])
        return formatted, colors

    def clear(self):
        self.messages.clear()
