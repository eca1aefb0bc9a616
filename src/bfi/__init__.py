from .api import RunOptions, RunResult, run_file, run_string
from .brackets import resolve_brackets
from .channels import ByteSink, ByteSource, MemoryChannel, hold, stdio_channels
from .errors import BFError, InputExhausted, OutputFailure, UnknownInstruction, UnmatchedBracket
from .interpreter import Interpreter
from .lexer import Op, Program, load_file, load_program
from .tape import Tape

__all__ = [
    'Interpreter',
    'Tape',
    'Op',
    'Program',
    'load_program',
    'load_file',
    'resolve_brackets',
    'ByteSource',
    'ByteSink',
    'MemoryChannel',
    'hold',
    'stdio_channels',
    'BFError',
    'UnmatchedBracket',
    'UnknownInstruction',
    'InputExhausted',
    'OutputFailure',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
