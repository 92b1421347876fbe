# scripts/run_analysis.py
import argparse

from skill_analysis.main import run


def main():
    parser = argparse.ArgumentParser(
        description="Extract content design skills from job postings and summarize them."
    )
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--input", default=None, help="Postings JSON (overrides config input_path)")
    parser.add_argument("--output", default=None, help="Results JSON (overrides config output_path)")
    parser.add_argument("--no-report", action="store_true", help="Skip the console report")
    args = parser.parse_args()

    run(
        args.config,
        input_path=args.input,
        output_path=args.output,
        print_report=False if args.no_report else None,
    )


if __name__ == "__main__":
    main()
