"""Serial Monitor - live view of a serial device's text stream."""

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    import asyncio

    from pydantic import ValidationError

    from serialmonitor.cli import build_overrides, console, parse_args, print_startup_screen
    from serialmonitor.composition import NoSerialPortError, create_container
    from serialmonitor.logging_setup import setup_logging, setup_logging_from_env

    args = parse_args(argv)
    if args.verbose:
        setup_logging(verbose=True)
    else:
        setup_logging_from_env()

    try:
        container = create_container(args.config, overrides=build_overrides(args))
    except (ValidationError, ValueError, NoSerialPortError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    print_startup_screen(container.port, container.model)

    from serialmonitor.app import run_monitor

    try:
        asyncio.run(run_monitor(container, console))
    except KeyboardInterrupt:
        pass
    return 0
