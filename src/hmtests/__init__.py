"""Unit tests for the Harmonical.

This package contains all unit tests for the Harmonical. It mirrors the
package structure of the codebase in the harmonical package, to keep it
clear where tests for everything are to be found.

The tests use unittest. Run them all with::
 python -m unittest discover -s src -t src

or with pytest from the project root.

"""
