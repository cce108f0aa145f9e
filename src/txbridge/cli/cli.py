# src/txbridge/cli/cli.py
import argparse
import asyncio
import json
import sys
from typing import List, Optional

import aiohttp

from ..config.settings import ServerConfig, UpstreamSettings
from ..exceptions import TxBridgeError
from ..monitoring.logging_config import LogConfig

class CLI:
    def __init__(self):
        self.config: Optional[ServerConfig] = None

    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 2

        return args.func(args) or 0

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='txbridge CLI')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        serve = subparsers.add_parser('serve', help='Run the HTTP API')
        serve.add_argument('--config', default=None, help='Path to a YAML settings file')
        serve.add_argument('--host', default=None, help='Bind host')
        serve.add_argument('--port', type=int, default=None, help='Bind port')
        serve.add_argument('--log-level', default=None, help='Logging level')
        serve.set_defaults(func=self.serve)

        fetch = subparsers.add_parser('fetch', help='Fetch transactions for an address once')
        fetch.add_argument('address', help='Address to look up')
        fetch.set_defaults(func=self.fetch)

        return parser

    def serve(self, args) -> int:
        import uvicorn

        self.config = ServerConfig(args.config)
        if args.host:
            self.config.update('server.host', args.host)
        if args.port:
            self.config.update('server.port', args.port)
        if args.log_level:
            self.config.update('logging.level', args.log_level)

        LogConfig(
            log_dir=self.config.get('logging.log_dir'),
            level=self.config.get('logging.level', 'INFO'),
        ).setup_logging()

        from ..api.server import create_app

        host = self.config.get('server.host')
        port = self.config.get('server.port')
        print(f"Serving txbridge at {host}:{port}")
        uvicorn.run(create_app(self.config), host=host, port=port)
        return 0

    def fetch(self, args) -> int:
        from ..transactions.service import TransactionService
        from ..upstream.client import UpstreamClient

        service = TransactionService(UpstreamSettings.from_env(), UpstreamClient())
        try:
            result = asyncio.run(service.get_transactions(args.address))
        except (TxBridgeError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            print(f"Error: {str(e) or 'An unknown error occurred'}", file=sys.stderr)
            return 1
        print(json.dumps(result.to_body(), indent=2))
        return 0 if result.success else 1

def main():
    cli = CLI()
    sys.exit(cli.main(sys.argv[1:]))

if __name__ == "__main__":
    main()
