from .compiler import build_fact_check_prompt, build_instruction_prompt, compile_prompt
from .schemas import FACT_CHECK_SCHEMA

__all__ = [
	'compile_prompt',
	'build_fact_check_prompt',
	'build_instruction_prompt',
	'FACT_CHECK_SCHEMA',
]
