"""Data model: AST nodes, runtime values, scope frames and outcomes."""
