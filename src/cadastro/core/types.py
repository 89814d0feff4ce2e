"""Type aliases used across the Cadastro package."""

from __future__ import annotations

RawText = str
CPF = str  # canonical 000.000.000-00
CPFDigits = str  # 11 bare digits
FormatName = str
