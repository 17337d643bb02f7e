"""Composition of several patterns into integrated code."""