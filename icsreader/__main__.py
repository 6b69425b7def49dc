import argparse
import json
import logging
import sys
import requests
from . import CalendarClient, DataClass, ICSError, load, load_config


def is_url(source):
    return source.startswith('http://') or source.startswith('https://')


def read_source(source, config, client):
    if is_url(source):
        return client.refresh_calendar(source, config['retries'], config['retry_delay'])
    return load(source, config['trim_crlf'], config['encoding'])


def main(argv=None):
    parser = argparse.ArgumentParser(prog='icsreader', description='Read the events of iCalendar files or feeds.')
    parser.add_argument('sources', nargs='*', metavar='SOURCE', help='.ics file path or http(s) url')
    parser.add_argument('-c', '--config', help='yaml configuration file')
    parser.add_argument('--keep-crlf', action='store_true', help="keep '\\r' and '\\n' in values")
    parser.add_argument('--json', metavar='OUT', help='write the events to OUT as json')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.keep_crlf:
        config['trim_crlf'] = False
    logging.basicConfig(level=config['log_level'])

    sources = args.sources or config['calendars']
    if not sources:
        parser.error('no calendar given (on the command line or in the config)')

    client = CalendarClient.from_config(config)
    status = 0
    exported = []
    for source in sources:
        try:
            calendar = read_source(source, config, client)
        except (ICSError, OSError, requests.exceptions.RequestException) as e:
            logging.error('icsreader[{}] :: {}'.format(source, e))
            status = 1
            continue

        logging.info('icsreader[{}] :: {} events.'.format(source, len(calendar)))
        if args.json:
            exported.append({'source': source, 'events': DataClass.json(calendar.events)})
        else:
            print("\n\n".join(str(e) for e in calendar))

    if args.json:
        with open(args.json, 'wb') as f:
            f.write(json.dumps(exported, indent=2, ensure_ascii=False).encode('utf-8'))
    return status


if __name__ == '__main__':
    sys.exit(main())
