"""Print messages from a statuses stream until interrupted."""
import argparse
import asyncio
import json
import signal
from typing import List, Optional

from .client import TwitterStreamingClient
from .exceptions import TwitterClientError
from .logger import logger
from .messages import DisconnectMessage, LimitNotice, Tweet, WarningMessage


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


def _ids(value: str) -> List[int]:
    return [int(item) for item in _csv(value)]


def _coordinates(value: str) -> List[float]:
    return [float(item) for item in _csv(value)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='twitter-stream', description='Print messages from a statuses stream')
    parser.add_argument('--raw', action='store_true', help='Print the raw JSON of each tweet')
    parser.add_argument('--stall-warnings', action='store_true', help='Request stall warnings')
    parser.add_argument('--language', type=_csv, default=[], help='Comma separated BCP 47 language codes')
    commands = parser.add_subparsers(dest='command', required=True)

    filter_cmd = commands.add_parser('filter', help='Statuses matching follow/track/locations')
    filter_cmd.add_argument('--follow', type=_ids, default=[], help='Comma separated user IDs')
    filter_cmd.add_argument('--track', type=_csv, default=[], help='Comma separated keywords')
    filter_cmd.add_argument('--locations', type=_coordinates, default=[],
                            help='Comma separated bounding box coordinates')

    commands.add_parser('sample', help='Random sample of public statuses')

    firehose_cmd = commands.add_parser('firehose', help='All public statuses')
    firehose_cmd.add_argument('--count', type=int, default=None, help='Messages to backfill')
    return parser


def print_message(message, raw: bool = False):
    if isinstance(message, Tweet):
        if raw:
            print(json.dumps(message.raw), flush=True)
        else:
            print(f"@{message.screen_name}: {message.text}", flush=True)
    elif isinstance(message, WarningMessage):
        logger.warning('Stall warning %s: %s (%s%% full)', message.code, message.message, message.percent_full)
    elif isinstance(message, LimitNotice):
        logger.info('Limit notice: %s tweets undelivered', message.track)
    elif isinstance(message, DisconnectMessage):
        logger.warning('Disconnected by server (%s): %s', message.code, message.reason)


def open_stream(client: TwitterStreamingClient, args, handler):
    """Start the stream selected on the command line."""
    if args.command == 'filter':
        return client.filter_statuses(
            follow=args.follow,
            tracks=args.track,
            locations=args.locations,
            languages=args.language,
            stall_warnings=args.stall_warnings,
            handler=handler,
        )
    if args.command == 'sample':
        return client.sample_statuses(languages=args.language, stall_warnings=args.stall_warnings, handler=handler)
    return client.firehose_statuses(
        count=args.count,
        languages=args.language,
        stall_warnings=args.stall_warnings,
        handler=handler,
    )


async def run(args, client: Optional[TwitterStreamingClient] = None):
    client = client or TwitterStreamingClient.from_env()
    async with client:
        stream = await open_stream(client, args, lambda message: print_message(message, raw=args.raw))

        def _stop():
            logger.info('Shutting down...')
            asyncio.ensure_future(stream.close())

        loop = asyncio.get_running_loop()
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, _stop)
            except NotImplementedError:
                # Windows event loops
                pass
        await stream.wait()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        asyncio.run(run(args))
    except ValueError as e:
        parser.error(str(e))
    except TwitterClientError as e:
        parser.exit(1, f"{parser.prog}: {e}\n")
    except KeyboardInterrupt:
        pass


if __name__ == '__main__':
    main()
