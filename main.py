#!/usr/bin/env python3
"""
Main Application Entry Point

Command-line demo composing the sample services through Result values.
"""

import argparse
import asyncio
import sys

from resultlib.services import HigherService, OtherService, SampleService
from resultlib.core.logging_config import configure_from_settings, get_logger
from resultlib.config.settings import get_settings

# Configure logging from settings
settings = get_settings()
configure_from_settings(settings)
logger = get_logger(__name__)


def run_services(sample_name: str, fail_other: bool = False, fail_interesting: bool = False) -> bool:
    """
    Run the service chain for a sample.

    Args:
        sample_name: Name of the sample to look up
        fail_other: Make OtherOperation return an error
        fail_interesting: Make InterestingOperation return an error

    Returns:
        True if the chain produced an Ok result, False otherwise
    """
    sample_service = SampleService()
    higher_service = HigherService(sample_service)
    other_service = OtherService(sample_service=sample_service)

    logger.info(higher_service.handle_specific_errors(sample_name))

    result = other_service.get_result(not fail_other, not fail_interesting, sample_name)
    if result.is_ok():
        logger.info(f"Other service returned {result.as_ok()!r}")
        return True

    logger.error(f"Other service failed: {result.as_error()!r}")
    return False


async def run_services_async(sample_name: str) -> bool:
    """
    Run the asynchronous sample lookup.

    Args:
        sample_name: Name of the sample to look up

    Returns:
        True if the lookup produced an Ok result, False otherwise
    """
    result = await SampleService().get_result_async(sample_name)
    await result.continue_with_action_async(_report_value)

    if result.is_error():
        logger.error(f"Sample lookup failed: {result.as_error()!r}")
    return result.is_ok()


async def _report_value(value: int):
    logger.info(f"Very important number is {value}")


def main():
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(
        description='Compose fallible demo operations through Result values'
    )

    parser.add_argument(
        '--sample',
        type=str,
        default=settings.demo_sample_name,
        help=f'Sample name to look up (default: {settings.demo_sample_name})'
    )

    parser.add_argument(
        '--fail-other',
        action='store_true',
        help='Make the first operation in the chain fail'
    )

    parser.add_argument(
        '--fail-interesting',
        action='store_true',
        help='Make the second operation in the chain fail'
    )

    parser.add_argument(
        '--async',
        dest='use_async',
        action='store_true',
        help='Run the asynchronous sample lookup instead'
    )

    args = parser.parse_args()

    try:
        if args.use_async:
            success = asyncio.run(run_services_async(args.sample))
        else:
            success = run_services(args.sample, args.fail_other, args.fail_interesting)
        sys.exit(0 if success else 1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)


if __name__ == '__main__':
    main()
