"""Shared fixtures for core unit tests"""

import pytest


MULTI_FILE_DIFF = """\
diff --git a/src/app.py b/src/app.py
index 83db48f..bf269f4 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,3 @@
 import os
-print("old")
+print("new")
 x = 1
@@ -10,2 +10,3 @@ def main():
 return 0
+# done
 end
diff --git a/new.txt b/new.txt
new file mode 100644
index 0000000..3be9c81
--- /dev/null
+++ b/new.txt
@@ -0,0 +1,2 @@
+x
+y
diff --git a/gone.txt b/gone.txt
deleted file mode 100644
index 3be9c81..0000000
--- a/gone.txt
+++ /dev/null
@@ -1,2 +0,0 @@
-x
-y
"""


@pytest.fixture(name="multi_diff")
def multi_diff_fixture():
    return MULTI_FILE_DIFF


@pytest.fixture(name="numbered_lines")
def numbered_lines_fixture():
    """Twenty distinct lines: l1 .. l20."""
    return [f"l{i}" for i in range(1, 21)]
