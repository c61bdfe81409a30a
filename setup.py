import pathlib
import re

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

package_init = here / "src" / "pairing_codec" / "__init__.py"
version_match = re.search(
    r'^__version__ = "([^"]+)"',
    package_init.read_text(encoding="utf-8"),
    re.MULTILINE,
)
assert version_match is not None

setuptools.setup(
    version=version_match.group(1),
    long_description=long_description,
    long_description_content_type="text/markdown",
)
