#--------------------------------------------------------------------------
#     This file is part of plasmid_map - a circular genetic map renderer

#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.

#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.

#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program

#--------------------------------------------------------------------------

import xml.dom.minidom as dom

from defusedxml import minidom as safe_minidom

from . import dom_extensions
from . import map_renderer
from . import render_ops



class svg_out(object):

  # options applied to the scene, see map_renderer._DEFAULT_STYLE
  style = None


  def __init__( self, width, height):
    self.width = width
    self.height = height

  def ops_to_svg_document( self, ops):
    self.document = dom.Document()
    top = dom_extensions.elementUnder( self.document,
                                       "svg",
                                       attributes=(("xmlns", "http://www.w3.org/2000/svg"),
                                                   ("version", "1.1"),
                                                   ("width", str( self.width)),
                                                   ("height", str( self.height)),
                                                   ("viewBox", "0 0 %s %s" % (self.width, self.height))))
    self.top = dom_extensions.elementUnder( top, "g")
    render_ops.ops_to_svg( self.top, ops)
    return self.document


  def record_to_svg( self, record):
    ops = map_renderer.record_to_ops( record, self.width, self.height, style=self.style)
    return self.ops_to_svg_document( ops)



def pretty_print_svg( svg_data):
  """Re-indent serialized SVG; svg_data may be bytes or text."""
  if isinstance( svg_data, bytes):
    svg_data = svg_data.decode( "utf-8")
  doc = safe_minidom.parseString( svg_data)
  return doc.toprettyxml( indent="  ")


def record_to_svg_text( record, width, height, style=None):
  renderer = svg_out( width, height)
  renderer.style = style
  doc = renderer.record_to_svg( record)
  return pretty_print_svg( doc.toxml( "utf-8"))
