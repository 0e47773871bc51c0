"""코드북 스키마 패키지.

Codebook schema package — Codebooks, codebook features, and the pluggable
feature support registry that compiles features into a type system.
"""
