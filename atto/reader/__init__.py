"""Reading Atto source: the lexer, expression nodes and the arity-driven parser."""
