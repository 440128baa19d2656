"""Train a code-point BPE tokenizer and compare it with tiktoken encodings."""

import argparse
import logging

import charbpe as cb
from datasets import load_dataset

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)


def load_corpus(dataset: str | None, n_rows: int) -> str:
    """Load training text from a Hugging Face dataset, or the bundled samples."""
    if dataset is None:
        return cb.sample_corpus()
    ds = load_dataset(dataset, split="train")
    lines = ds[:n_rows]["text"]
    print(f"number of lines {len(lines)}")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Train and compare BPE tokenizers")
    parser.add_argument("--dataset", default=None, help="Hugging Face dataset name")
    parser.add_argument("--rows", type=int, default=1000, help="Rows to load from the dataset")
    parser.add_argument("--vocab-size", type=int, default=500, help="Target vocabulary size")
    parser.add_argument(
        "--mode", default="character", choices=cb.list_encode_modes(), help="Encode mode"
    )
    parser.add_argument(
        "--models", nargs="*", default=["gpt-4o", "gpt-3.5-turbo"], help="tiktoken models"
    )
    parser.add_argument("--verbose", action="store_true", help="Log every merge")
    args = parser.parse_args()

    corpus = load_corpus(args.dataset, args.rows)
    print(f"number of chars {len(corpus)}")

    tok = cb.get_tokenizer(args.mode)
    tok.train(corpus, args.vocab_size, verbose=args.verbose)
    print(f"vocabulary size {tok.vocab_size()} ({len(tok.merges)} merges)")

    encoders: list[cb.Tokenizer] = [tok]
    for name in args.models:
        enc = cb.get_encoder(name)
        if enc.fell_back:
            print(f"{name}: using {enc.model_name()} instead")
        encoders.append(enc)

    try:
        for label, text in cb.SAMPLE_TEXTS.items():
            print(f"\n{label}")
            for model, stats in cb.compare_encoders(text, encoders).items():
                print(
                    f"  {model:<16} tokens={stats.tokens:<5} unique={stats.unique:<5} "
                    f"ratio={stats.compression:.3f} cost=${stats.cost:.5f}"
                )
    finally:
        for enc in encoders:
            enc.close()


if __name__ == "__main__":
    main()
