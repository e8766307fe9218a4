"""Service layer — decision core, effect interpreter, and reactive runtime.

The decision core (:mod:`.mission`) is pure. Only the interpreter
(:mod:`.interpreter`) performs I/O, through collaborators injected at
construction time.
"""
