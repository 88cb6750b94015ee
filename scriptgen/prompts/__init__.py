from .script import build_script_prompt
from .templates import SCRIPT_GENERATION_PROMPT, SCRIPT_SYSTEM_PROMPT

__all__ = ["build_script_prompt", "SCRIPT_GENERATION_PROMPT", "SCRIPT_SYSTEM_PROMPT"]
