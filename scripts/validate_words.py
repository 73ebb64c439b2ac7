import argparse
import os
import sys
from collections import Counter

from tqdm import tqdm

# Add project root to Python path to allow importing petitbac modules
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

try:
    from petitbac.db.base import Base
    from petitbac.db.session import engine
    from petitbac.services.categorization_engine import CategorizationEngine
    from petitbac.services.cache_service import CacheService
    from petitbac.services.validation_service import ValidationService
    from petitbac.services.validators.fixed_list import FixedListValidator
    from petitbac.services.validators.local_cache import LocalCacheValidator
    from petitbac.services.validators.semantic_ai import SemanticAiValidator
    from petitbac.services.validators.web_dictionary import WebDictionaryValidator
except ImportError as e:
    print(f"Error importing petitbac modules: {e}")
    print("Make sure the script is run from the project root or the PYTHONPATH is set correctly.")
    sys.exit(1)

def read_words(args) -> list[str]:
    words = list(args.words)
    if args.file:
        with open(args.file, encoding="utf-8") as f_in:
            words.extend(line.strip() for line in f_in if line.strip())
    return words

def build_service(offline: bool) -> ValidationService:
    cache_service = CacheService()
    engine_ = CategorizationEngine([
        LocalCacheValidator(cache_service),
        FixedListValidator(),
        WebDictionaryValidator(enabled=not offline),
        SemanticAiValidator(),
    ])
    return ValidationService(engine=engine_, cache_service=cache_service)

def main():
    parser = argparse.ArgumentParser(
        description="Validate a batch of words for one category through the full validation pipeline."
    )
    parser.add_argument("category", help="Category name or label, e.g. ANIMAL, Pays, 'Fruit/Légume'.")
    parser.add_argument("words", nargs="*", help="Words to validate.")
    parser.add_argument("-f", "--file", help="Text file with one word per line.")
    parser.add_argument(
        "--offline", action="store_true",
        help="Disable the online dictionary validator (cache and fixed lists only).",
    )
    args = parser.parse_args()

    words = read_words(args)
    if not words:
        parser.error("No words given. Pass words as arguments or with --file.")

    Base.metadata.create_all(bind=engine)
    service = build_service(args.offline)
    print(f"Pipeline: {' -> '.join(service.engine.available_validators())}")

    results = []
    for word in tqdm(words, desc=f"Validating ({args.category})", unit="word"):
        results.append((word, service.validate_word(args.category, word)))

    print()
    for word, outcome in results:
        print(f"{word:<20} {outcome.status.value:<9} {outcome.confidence:.2f}  {outcome.source:<14} {outcome.details}")

    summary = Counter(outcome.status.value for _, outcome in results)
    print(f"\n--- Summary: {dict(summary)} ---")
    print(f"Cached words: {service.validation_stats()['cached_words']}")

if __name__ == "__main__":
    main()
