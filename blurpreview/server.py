"""
Placeholder Server - HTTP server rendering BlurHash placeholders
"""

from flask import Flask, send_file, jsonify, request
from io import BytesIO
from .decoder import BlurHashDecoder, average_color, parse_header
from .errors import DecodeError
from .picture import Picture


def create_app(decoder=None, default_size=(32, 32), max_size=1024):
    """
    Create Flask app for placeholder serving.
    
    Args:
        decoder: BlurHashDecoding implementation (BlurHashDecoder by default)
        default_size: (width, height) used when a request gives none
        max_size: Largest width or height a request may ask for
        
    Returns:
        Flask app
    """
    app = Flask(__name__)
    if decoder is None:
        decoder = BlurHashDecoder()
    
    def png_response(image):
        img_io = BytesIO()
        image.save(img_io, 'PNG')
        img_io.seek(0)
        return send_file(img_io, mimetype='image/png')
    
    def error_response(error):
        return jsonify({'error': str(error), 'kind': type(error).__name__}), 400
    
    def requested_size():
        width = int(request.args.get('width', default_size[0]))
        height = int(request.args.get('height', default_size[1]))
        if width > max_size or height > max_size:
            raise ValueError(f"Size {width}x{height} exceeds the {max_size} pixel limit")
        return width, height
    
    @app.route('/health')
    def health():
        """Health check endpoint."""
        return jsonify({'status': 'ok'})
    
    @app.route('/placeholder')
    def placeholder():
        """
        Render a BlurHash.
        
        Query params: hash, width, height, punch
        Returns PNG image.
        """
        blur_hash = request.args.get('hash')
        if not blur_hash:
            return jsonify({'error': 'Missing hash parameter'}), 400
        
        try:
            size = requested_size()
            punch = float(request.args.get('punch', 1.0))
            image = decoder.decode_image(blur_hash, size, punch)
        except ValueError as e:
            # DecodeError is a ValueError too
            return error_response(e)
        
        return png_response(image)
    
    @app.route('/placeholder/info')
    def placeholder_info():
        """Describe a BlurHash without rendering it."""
        blur_hash = request.args.get('hash')
        if not blur_hash:
            return jsonify({'error': 'Missing hash parameter'}), 400
        
        try:
            header = parse_header(blur_hash)
        except DecodeError as e:
            return error_response(e)
        
        r, g, b = average_color(blur_hash)
        return jsonify({
            'num_x': header.num_x,
            'num_y': header.num_y,
            'maximum_value': header.maximum_value,
            'average_color': f"#{r:02x}{g:02x}{b:02x}"
        })
    
    @app.route('/pictures/placeholder', methods=['POST'])
    def picture_placeholder():
        """
        Render the placeholder of a picture described by a JSON body.
        
        Returns PNG image at the picture's placeholder size.
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Expected a JSON object'}), 400
        
        try:
            picture = Picture.from_dict(data)
        except KeyError as e:
            return jsonify({'error': f"Missing field {e.args[0]}"}), 400
        except ValueError as e:
            return error_response(e)
        
        width, height = picture.blur_hash_size
        if width > max_size or height > max_size:
            return error_response(ValueError(
                f"Placeholder size {width}x{height} exceeds the {max_size} pixel limit"
            ))
        
        try:
            image = picture.placeholder(decoder, float(request.args.get('punch', 1.0)))
        except ValueError as e:
            return error_response(e)
        
        return png_response(image)
    
    return app


def run_server(host='0.0.0.0', port=5000, debug=False, **app_kwargs):
    """
    Run the placeholder server.
    
    Args:
        host: Host to bind to
        port: Port to bind to
        debug: Enable debug mode
        app_kwargs: Passed through to create_app
    """
    app = create_app(**app_kwargs)
    app.run(host=host, port=port, debug=debug)
