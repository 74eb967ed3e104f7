from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

DOCUMENT = '''# JS Algorithms - Palindrome Checker

## 1

### --description--

Create a file called `index.js`.

### --tests--

You should create `index.js`.

```js
const exists = await fileExists('index.js');
assert(exists);
```

It should log hello.

```js
assert.include(output, 'hello');
```

### --seed--

#### --"index.js"--

```js
console.log("hello");
```

#### --"src/util.js"--

```js
export const x = 1;
```

#### --cmd--

```bash
npm install
```

#### --cmd--

```bash
npm test
```

#### --force--

## 2

### --description--

Second lesson.

### --tests--

No tests yet.

### --seed--

## 3

### --description--

Final lesson.
'''


@pytest.fixture
def document() -> str:
    """Three-lesson document in the `## n` / `### --section--` layout."""
    return DOCUMENT


@pytest.fixture
def document_path(tmp_path: Path, document: str) -> Path:
    """The sample document written to disk."""
    path = tmp_path / "palindrome.md"
    path.write_text(document, encoding="utf-8")
    return path
