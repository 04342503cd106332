"""
Only the root tests directory carries an __init__.py.

Test subdirectories mirror the package path (tests/unit/majik_money/...) and work as
namespace packages (PEP 420), so they need no __init__.py of their own. Test module
names must therefore stay unique across the whole tree.
"""
