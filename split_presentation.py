"""
Simple CLI for splitting a presentation into one file per slide.
Usage: python split_presentation.py <file> [output_dir]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from presentation_splitter import split_presentation


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: python split_presentation.py <file> [output_dir]")
        sys.exit(1)

    file_path = sys.argv[1]
    output_dir = sys.argv[2] if len(sys.argv) == 3 else None

    print(f"Splitting {file_path}...")
    slides = split_presentation(file_path, output_dir=output_dir)

    print("\n" + "="*60)
    for slide in slides:
        print(f"Slide {slide.slide_number}/{len(slides)}: {slide.path} ({slide.mimetype})")

    print("="*60)
    print(f"Created {len(slides)} files")


if __name__ == "__main__":
    main()
