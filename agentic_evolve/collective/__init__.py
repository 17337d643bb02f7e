"""Collective learning: pattern usage tracking, confidence decay and promotion."""