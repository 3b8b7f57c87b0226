import logging

import click
from sqlalchemy.orm import DeclarativeBase

from .parser import resolve
from .schema import ModelSchema
from .utils import all_model, load_class


def _models(target):
    if isinstance(target, type) and issubclass(target, DeclarativeBase) and not hasattr(target, '__table__'):
        return all_model(target)
    return (target,)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log the resolution steps.')
def main(verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument('class_path')
@click.option('--name', help='Display name of the view.')
@click.option('--title', help='Title of the view.')
@click.option('--remove', multiple=True, help='Field to remove, can be repeated.')
def describe(class_path, name, title, remove):
    """Print the resolved view of a model, or of every model of a declarative base."""
    opts = {}
    if name:
        opts['name'] = name
    if title:
        opts['title'] = title
    if remove:
        opts['remove'] = remove
    for model in _models(load_class(class_path)):
        click.echo(resolve(ModelSchema(model), **opts).to_json().decode())


if __name__ == '__main__':
    main()
