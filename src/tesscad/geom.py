## foundational point and polygon helpers for tessCAD
## Copyright (c) 2026 tessCAD contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""point and polygon representations for **tessCAD**

====================
OVERVIEW
====================

Centre sets produced by ``tesscad.centers`` are plain ``[x, y]``
pairs.  Once a renderer turns a centre into a drawable tile outline it
works with homogeneous points, ``[x, y, z, w]``, so that outlines can
be lifted into 3D (extrusion) without changing representation.

points
======

A point is a list of four numbers with ``w > 0``.  The ``point()``
convenience function accepts scalars, a 2-element centre, or another
point: ::

   p1 = point(1.0, 2.0)          # [1.0, 2.0, 0, 1]
   p2 = point([1.0, 2.0])        # same thing, from a centre
   p3 = point(p1)                # value-safe copy

polygons
========

A polygon is a list of four or more points whose first and last
points coincide within ``epsilon``.

"""
from math import *

## constants
epsilon = 0.000005

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

## operations on vectors
## ------------------------

## vector operations ignore w, so they work on 3-tuples and on points

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and \
        isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def cross(a,b):
    """ 3 vector cross product, `a x b`"""
    return [a[1]*b[2]-a[2]*b[1],
            a[2]*b[0]-a[0]*b[2],
            a[0]*b[1]-a[1]*b[0],1.0]

def mag(a):
    """ 3 vector magnitude"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):  # compute distance between two points a & b
    """ 3D distance between two points, ignoring w"""
    return mag(sub(a,b))

## operations on points
## --------------------

def point(x=False,y=False,z=False,w=False):
    """Point creation from point, ``[x, y]`` centre, or scalars"""
    if ispoint(x):
        return list(x)
    if isinstance(x,(list,tuple)) and len(x) == 2 and \
       isgoodnum(x[0]) and isgoodnum(x[1]):
        return [x[0],x[1],0,1]
    r = [0,0,0,1]
    if isgoodnum(x):
        r[0]=x
        if isgoodnum(y):
            r[1]=y
            if isgoodnum(z):
                r[2]=z
                if isgoodnum(w):
                    r[3]=w
    if r[3] > 0:
        return r
    else:
        raise ValueError('bad w argument to point()')

def ispoint(x):
    """ is it a point?"""
    return isvect(x) and x[3] > 0.0

## operations on polygons
## ----------------------

def ispolygon(a):
    """is ``a`` a closed polygon, first and last points coincident?"""
    return isinstance(a,list) and len(a) > 3 and \
        all(ispoint(x) for x in a) and dist(a[0],a[-1]) < epsilon

def polyvertices(a):
    """ the distinct vertices of poly ``a``, dropping the closing point
    of a polygon"""
    if ispolygon(a):
        return a[:-1]
    return list(a)
