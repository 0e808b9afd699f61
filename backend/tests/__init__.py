"""
Storyloom Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Test whole turns through the dispatcher and session
"""
