"""
Autocomplete API – a small HTTP front end over a shared in-memory Trie.

Run:
    SEED_WORDS=apple,banana,band python autocomplete_api.py
Then try http://localhost:8000/api/autocomplete?prefix=ban
"""

import logging
import os
import threading
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException

from trie import Trie

SEED_WORDS = os.environ.get("SEED_WORDS", "")
WORDS_FILE = os.environ.get("WORDS_FILE", "")
MAX_SUGGESTIONS = int(os.environ.get("MAX_SUGGESTIONS", "50"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

logger = logging.getLogger(__name__)

app = FastAPI(title="Trie Autocomplete API", version="0.1.0")

# the trie itself does no locking; every access goes through this
trie_lock = threading.Lock()


def get_trie() -> Trie:
    if not hasattr(app.state, "trie"):
        app.state.trie = Trie()
    return app.state.trie


def load_seed_words() -> list[str]:
    words = [w.strip() for w in SEED_WORDS.split(",") if w.strip()]
    if WORDS_FILE:
        with open(WORDS_FILE, "r", encoding="utf-8") as f:
            words.extend(line.strip() for line in f if line.strip())
    return words


@app.on_event("startup")
def startup():
    words = load_seed_words()
    trie = get_trie()
    with trie_lock:
        for word in words:
            trie.insert(word)
        total = trie.count_words()
    logger.info("seeded trie with %d words (%d distinct)", len(words), total)


@app.get("/health")
async def health():
    return {"ok": True}


@app.post("/api/words")
async def add_word(data: Dict[str, Any]):
    word = data.get("word")
    if not isinstance(word, str):
        raise HTTPException(status_code=400, detail="word must be a string")

    trie = get_trie()
    with trie_lock:
        trie.insert(word)
    logger.info("inserted %r", word.lower())
    return {"ok": True, "word": word.lower()}


@app.delete("/api/words/{word}")
async def remove_word(word: str):
    trie = get_trie()
    with trie_lock:
        deleted = trie.delete(word)
    if not deleted:
        raise HTTPException(status_code=404, detail="word not found")
    logger.info("deleted %r", word.lower())
    return {"ok": True, "deleted": word.lower()}


@app.get("/api/search")
async def search(word: str):
    trie = get_trie()
    with trie_lock:
        found = trie.search(word)
    return {"word": word.lower(), "found": found}


@app.get("/api/prefix")
async def prefix_exists(prefix: str):
    trie = get_trie()
    with trie_lock:
        exists = trie.starts_with(prefix)
    return {"prefix": prefix.lower(), "exists": exists}


@app.get("/api/autocomplete")
async def autocomplete(prefix: str = "", limit: Optional[int] = None):
    maximum = MAX_SUGGESTIONS
    limit = max(1, min(limit if limit is not None else maximum, maximum))
    trie = get_trie()
    with trie_lock:
        suggestions = trie.autocomplete(prefix)
    return {"prefix": prefix.lower(), "suggestions": suggestions[:limit]}


@app.get("/api/count")
async def count():
    trie = get_trie()
    with trie_lock:
        total = trie.count_words()
    return {"count": total}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=HOST, port=PORT)
