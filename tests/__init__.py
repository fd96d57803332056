"""
Test suite for decimal-rsa

Contains:
- tests/unit/          : Unit tests for arithmetic, codec, framing, protocol and key config
"""
