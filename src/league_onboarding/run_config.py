import sys

from league_onboarding.execution.config_executor import ConfigExecutor


def main():
    if len(sys.argv) != 2:
        print("Usage: python -m league_onboarding.run_config <config.yaml>")
        sys.exit(1)

    config_path = sys.argv[1]
    executor = ConfigExecutor(config_path)
    result = executor.execute()

    results = result["results"]
    print("\n=== Execution Completed ===")
    print(f"Files: {len(results)}")
    print(f"Succeeded: {sum(1 for r in results if r.success)}")
    print(f"Artifacts: {len(result['artifacts'])}")


if __name__ == "__main__":
    main()
