from pprint import pprint

from tarotka.logging_config import setup_logging
from tarotka.logic import perform_reading
from tarotka.parsing import split_bold


def _render(text: str) -> str:
    """Terminal rendering of **bold** segments."""
    return "".join(f"\033[1m{seg}\033[0m" if bold else seg for seg, bold in split_bold(text))


if __name__ == "__main__":
    setup_logging()
    # Example: relationship spread (Ty / Partner / Vaše pouto)
    result = perform_reading(
        spread="love",
        seed="demo-seed",
        question="Co je mezi námi?",
    )

    pprint(result["cards"], sort_dicts=False)
    if result["error"]:
        print(result["error"]["message"])
    for card, meaning in zip(result["cards"], result["meanings"]):
        print(f"\n{card['label']} — {card['card_name_czech']} ({card['orientation']})")
        print(_render(meaning))
