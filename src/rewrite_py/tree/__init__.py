"""
Lossless syntax tree model.

Re-exports the node kinds, space model and markers.
"""

from rewrite_py.tree.base import J, Py, Tree
from rewrite_py.tree.generic import (
  Annotation,
  ArrayAccess,
  ArrayDimension,
  Assignment,
  AssignmentOperation,
  Binary,
  Block,
  Break,
  Case,
  Catch,
  ClassDeclaration,
  Continue,
  Else,
  Empty,
  FieldAccess,
  ForEachControl,
  ForEachLoop,
  Identifier,
  If,
  Import,
  Lambda,
  Literal,
  LiteralKind,
  MethodDeclaration,
  MethodInvocation,
  Modifier,
  NamedVariable,
  NewArray,
  Parentheses,
  Return,
  Switch,
  Ternary,
  Throw,
  Try,
  TryResource,
  Unary,
  VariableDeclarations,
  WhileLoop,
)
from rewrite_py.tree.grouping import StatementGroup, find_statement_group
from rewrite_py.tree.markers import (
  BuiltinDesugar,
  ExtraPadding,
  GroupedStatement,
  MagicMethodDesugar,
  Markers,
  OmitParentheses,
  PaddingLocation,
  StringFlags,
  TrailingComma,
)
from rewrite_py.tree.operators import AssignmentOperator, BinaryOperator, UnaryOperator
from rewrite_py.tree.padding import Container, LeftPadded, RightPadded
from rewrite_py.tree.python import (
  Assert,
  Await,
  CompilationUnit,
  Comprehension,
  ComprehensionClause,
  ComprehensionCondition,
  ComprehensionKind,
  Del,
  DictLiteral,
  ErrorFrom,
  ExceptionType,
  ExpressionStatement,
  KeyValue,
  MatchCase,
  NamedExpression,
  Pass,
  Pattern,
  PatternKind,
  ScopeKind,
  SpecialParameter,
  SpecialParameterKind,
  StarExpression,
  StarKind,
  TypeHint,
  TypeHintedExpression,
  TypeHintKind,
  VariableScope,
  Yield,
)
from rewrite_py.tree.space import Comment, Space
