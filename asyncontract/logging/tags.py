# asyncontract/logging/tags.py
"""
Subsystem tags prefixed to log messages.

Changing a tag here updates it project-wide.
"""

CATALOG = "[CATALOG]"
DISCOVERY = "[DISCOVERY]"
WALKER = "[WALKER]"
ASSEMBLER = "[ASSEMBLER]"
DOCUMENT = "[DOCUMENT]"
INDEX = "[INDEX]"
EMITTER = "[EMITTER]"
TASK = "[TASK]"
CLI = "[CLI]"
