"""
CLI Handlers Package.

Each module implements the logic of one or more `locale-bootstrap` subcommands.
"""
