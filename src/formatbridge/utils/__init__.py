"""Shared utilities: logging and text helpers"""
