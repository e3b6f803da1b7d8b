"""
Application Layer

Process scaffolding for running the resolver from the command line.

Key Components:
- config.py: Configuration management using Pydantic settings
- cli.py: Logging and error reporting setup
"""
