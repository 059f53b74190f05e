from .symbols import OPERATORS, OpKind, normalize_symbols
from .errors import EngineError, ErrorKind, ConfigError
from .tokenizer import Token, TokenKind, tokenize
from .expr import Var, Unary, Binary, Expr
from .parser import ParsedExpression, parse, to_postfix, build_ast
from .evaluator import evaluate as evaluate_ast, evaluate_postfix
from .assignments import enumerate_assignments, validate_variables
from .steps import extract_subexpressions
from .classify import Classification, classify
from .gates import GateGraph, GateGraphBuilder, GateType, build_gate_graph
from .rewrite import eliminate_conditionals
from .config import EngineConfig, load_config
from .engine import EvaluationRequest, EvaluationResult, evaluate, evaluate_expression

__version__ = "0.1.0"
