"""
Core rewrite logic: symbol classification, import pattern matching,
named-import parsing and the rewrite orchestrator.
"""
