"""lintignore - combine ignore patterns from nested configs into one path predicate"""
