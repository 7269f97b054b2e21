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

"""Small helpers for building minidom trees."""


#============================================
def elementUnder(parent, name, attributes=()):
	"""Create element name under parent, set attributes and return it."""
	if parent.nodeType == parent.DOCUMENT_NODE:
		doc = parent
	else:
		doc = parent.ownerDocument
	element = doc.createElement(name)
	for key, value in attributes:
		element.setAttribute(key, value)
	parent.appendChild(element)
	return element


#============================================
def textOnlyElementUnder(parent, name, text, attributes=()):
	element = elementUnder(parent, name, attributes)
	doc = element.ownerDocument
	element.appendChild(doc.createTextNode(text))
	return element
