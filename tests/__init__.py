"""
Only the root tests directory carries an __init__.py; subdirectories are plain
directories collected by pytest, so keep test module names unique.
"""
