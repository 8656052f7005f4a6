"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O (DB/FS/network/time randomness); compiling SQL is fine.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
