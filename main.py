# Main.py
""""" Entry point for the keypad calculator.

   Responsibilities:
   - Verify required files exist when run from a source checkout
   - Load configuration and start the Qt keypad

"""""
import sys
from pathlib import Path
from calcpad import config_manager as config_manager, UI as UI


PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast if engine files are missing / moved / renamed, instead of a vague
      crash when the UI imports them.
    """

    package_dir = PROJECT_ROOT / "calcpad"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "Calculator.py",
        package_dir / "InputEngine.py",
        package_dir / "MathEngine.py",
        package_dir / "Display.py",
        package_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def main():

    """
    Load configuration and start the GUI.
    - Keep this thin: no calculator logic here.
    """

    all_settings = config_manager.load_setting_value("all")
    descriptions = config_manager.load_setting_description("all")
    print("Config loaded:")
    for key_value, value in all_settings.items():
        print(f"  {descriptions.get(key_value, key_value)}: {value}")

    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main()


if __name__ == "__main__":
    check_files_exist()
    main()
