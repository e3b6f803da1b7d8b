"""
Models

Pydantic models shared by the resolution pipeline and the CLI.

Key Components:
- options.py: ResolutionOptions and the DoHProvider enumeration
"""
