"""Matchers that find the best stored pattern for a function signature."""