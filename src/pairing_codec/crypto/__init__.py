"""
Algebraic objects built from decoded parameters: prime fields, their
quadratic and cubic extensions, and short Weierstrass curves over them.
"""
