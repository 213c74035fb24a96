"""
Pure helpers with no dependency on the tree or sequence algorithms.

Modules:
    functionals - Getters, checks, reducers and key helpers over lists and mappings
"""
