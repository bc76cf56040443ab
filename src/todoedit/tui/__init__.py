"""Textual presentation layer for todoedit"""
