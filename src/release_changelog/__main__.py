from release_changelog.cli import run

if __name__ == "__main__":
    run()
