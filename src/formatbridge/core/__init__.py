"""Core models, capability tables, errors and the Morse codec"""
