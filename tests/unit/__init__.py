"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; seed or patch randomness.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
