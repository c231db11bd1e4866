# church_core/core/__init__.py
"""
Leaf layer of the encoding: booleans, pairs, fixed point / conditional,
and numerals. Nothing in here imports from the rest of church_core.
"""
