"""Shared fixtures for core unit tests"""

import pytest

from mdexcerpt.core.parse import parse_text


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

<!-- more -->

Footer paragraph.
"""

SAMPLE_MDX = """\
import Chart from '../components/Chart'

Visible.

<Chart data={[1, 2, 3]} />

{/* more */}

Hidden.
"""


@pytest.fixture(name="md")
def md_fixture():
    """Parse plain markdown into a document tree."""
    return lambda text: parse_text(text)


@pytest.fixture(name="mdx")
def mdx_fixture():
    """Parse MDX into a document tree."""
    return lambda text: parse_text(text, mdx=True)


@pytest.fixture(name="sample_tree")
def sample_tree_fixture(md):
    return md(SAMPLE_MD)


@pytest.fixture(name="sample_mdx_tree")
def sample_mdx_tree_fixture(mdx):
    return mdx(SAMPLE_MDX)
