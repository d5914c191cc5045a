# scripts/import_verses.py
import json
import sys
from pathlib import Path

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
sys.path.insert(0, str(backend_dir))

from config import Config
from store import get_store


def parse_reference(ref):
    """Parse a reference like 'Jean 3:16' into (book_name, chapter, verse)"""
    book_chapter, verse = ref.rsplit(':', 1)
    book_parts = book_chapter.rsplit(' ', 1)
    chapter = book_parts[-1]
    book_name = ' '.join(book_parts[:-1])
    return book_name, int(chapter), int(verse)


def clean_verse_text(text):
    """Clean verse text by removing any leading '#' and trimming whitespace"""
    return text.lstrip('#').strip()


def convert_verses(verses_data):
    """Turn a {reference: text} mapping into verse records, skipping bad references."""
    verses = []
    skipped = []
    for ref, text in verses_data.items():
        try:
            book_name, chapter, verse = parse_reference(ref)
        except ValueError:
            skipped.append(ref)
            continue
        clean_text = clean_verse_text(text)
        if not clean_text:
            skipped.append(ref)
            continue
        verses.append({
            "reference": ref,
            "book": book_name,
            "chapter": chapter,
            "verse": verse,
            "text": clean_text
        })
    return verses, skipped


def import_verses(json_path, target=None):
    """Replace the verse collection with the verses in *json_path*"""
    target = target or Config.BIBLE_FILE
    print(f"Reading JSON file from: {json_path}")

    with open(json_path, 'r', encoding='utf-8') as f:
        verses_data = json.load(f)

    verses, skipped = convert_verses(verses_data)
    get_store(target).write_all(verses)

    print(f"\nImport complete!")
    print(f"Wrote {len(verses)} verses to {target}")
    if skipped:
        print(f"Skipped {len(skipped)} entries with an unreadable reference or empty text")
    return verses


if __name__ == '__main__':
    if len(sys.argv) not in (2, 3):
        print("Usage: python scripts/import_verses.py <path_to_verses.json> [target_bible.json]")
        sys.exit(1)

    import_verses(*sys.argv[1:])
