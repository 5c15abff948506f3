"""Mood-based music finder built on the iTunes Search API"""
