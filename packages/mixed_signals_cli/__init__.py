"""Command-line interface for mixed_signals"""
