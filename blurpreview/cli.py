"""
Command-line interface for blurpreview
"""

import logging

import click
from pathlib import Path
from .decoder import BlurHashDecoder, average_color, parse_header
from .errors import DecodeError
from .server import run_server


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose):
    """blurpreview - BlurHash placeholder decoding"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )


@main.command()
@click.argument('blur_hash')
@click.argument('output_image', type=click.Path())
@click.option('--width', '-w', default=32, type=int,
              help='Output width in pixels (default: 32)')
@click.option('--height', '-h', default=32, type=int,
              help='Output height in pixels (default: 32)')
@click.option('--punch', '-p', default=1.0, type=float,
              help='Contrast multiplier (default: 1.0)')
def decode(blur_hash, output_image, width, height, punch):
    """Decode a BlurHash into an image file (.rgb writes raw bytes)."""
    decoder = BlurHashDecoder(punch=punch)
    
    try:
        pixels = decoder.decode(blur_hash, (width, height))
    except DecodeError as e:
        raise click.ClickException(str(e))
    
    output_image = Path(output_image)
    if output_image.suffix.lower() == '.rgb':
        output_image.write_bytes(pixels.data)
    else:
        pixels.to_image().save(output_image)
    
    click.echo(f"Decoded {width}x{height} placeholder saved to {output_image}")


@main.command()
@click.argument('blur_hash')
def info(blur_hash):
    """Show what a BlurHash encodes."""
    try:
        header = parse_header(blur_hash)
        r, g, b = average_color(blur_hash)
    except DecodeError as e:
        raise click.ClickException(str(e))
    
    click.echo(f"Components: {header.num_x}x{header.num_y} "
               f"({header.num_x * header.num_y} total)")
    click.echo(f"Maximum AC value: {header.maximum_value:.4f}")
    click.echo(f"Average color: #{r:02x}{g:02x}{b:02x}")


@main.command()
@click.option('--host', default='0.0.0.0', help='Host to bind to (default: 0.0.0.0)')
@click.option('--port', default=5000, type=int, help='Port to bind to (default: 5000)')
@click.option('--debug/--no-debug', default=False, help='Enable debug mode')
@click.option('--max-size', default=1024, type=int,
              help='Largest width or height served (default: 1024)')
def serve(host, port, debug, max_size):
    """Start the placeholder server."""
    click.echo(f"Starting blurpreview server on {host}:{port}...")
    
    run_server(host=host, port=port, debug=debug, max_size=max_size)


if __name__ == '__main__':
    main()
