from __future__ import annotations

import asyncio

from clients.members_sdk.config import SDKConfig

from admin_panel.app.admin_console import AdminConsole
from admin_panel.app.config import AppConfig
from admin_panel.app.directory_controller import DirectoryController
from admin_panel.app.infrastructure.logging.logger import get_logger


def _print_runtime_config(app_config: AppConfig, sdk_config: SDKConfig) -> None:
    print("Admin Panel")
    print(f"Members URL: {sdk_config.members_url}")
    print(f"Timeout: {sdk_config.timeout_seconds}s")
    print(f"Verify SSL: {sdk_config.verify_ssl}")
    print(f"Page size: {app_config.page_size}")


def run_cli() -> None:
    app_config = AppConfig.from_env()
    sdk_config = SDKConfig.from_env()
    logger = get_logger("admin_panel", app_config.logging_level)
    controller = DirectoryController(config=app_config, sdk_config=sdk_config, logger=logger)
    _print_runtime_config(app_config, sdk_config)

    with asyncio.Runner() as runner:
        console = AdminConsole(controller, run_async=runner.run)
        try:
            console.run()
        except (KeyboardInterrupt, EOFError):
            print()
        finally:
            controller.unmount()
            runner.run(controller.aclose())


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
