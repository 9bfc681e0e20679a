"""
Test suite for keystroke recipe recording.

Focus areas:
- Count prefix parsing
- Property store semantics
- Resolution precedence
- Session lifecycle and failure containment
"""
