"""Shared infrastructure: exceptions and the process container"""
