"""Set the version string in setup.py and in the package __init__.py

Usage:
    python .github/update_version.py 0.2.0 setup.py fieldmath/__init__.py
"""
import re
import sys

version = sys.argv[1]

for file_i in sys.argv[2:]:
    with open(file_i, 'r') as f:
        content = f.read()
        content_new = re.sub(r"(?<=version\=\").*?(?=\")", str(version), content, flags=re.M)
        content_new = re.sub(r"(?<=__version__ \= \").*?(?=\")", str(version), content_new, flags=re.M)
    with open(file_i, 'w') as f:
        f.write(content_new)
