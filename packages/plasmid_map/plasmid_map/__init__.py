#--------------------------------------------------------------------------
#     This file is part of plasmid_map - a circular genetic map renderer
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

from . import backbone
from . import dom_extensions
from . import feature_geometry
from . import label_layout
from . import map_layout
from . import map_renderer
from . import render_ops
from . import render_out
from . import sequence_record
from . import svg_out

from .map_renderer import record_to_ops
from .sequence_record import Feature
from .sequence_record import RecordFieldError
from .sequence_record import SequenceRecord

try:
	from . import cairo_out
except ImportError:
	CAIRO_AVAILABLE = False
else:
	CAIRO_AVAILABLE = True

__version__ = "0.1.0"
