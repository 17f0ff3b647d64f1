"""XML namespace URIs of the core dialects."""

ATOM_10 = "http://www.w3.org/2005/Atom"
ATOM_03 = "http://purl.org/atom/ns#"
ATOM_PUBLISHING = "http://www.w3.org/2007/app"
APML_06 = "http://www.apml.org/apml-0.6"
BLOGML_20 = "http://www.blogml.com/2006/09/BlogML"
RSD = "http://archipelago.phrasewise.com/rsd"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RSS_10 = "http://purl.org/rss/1.0/"
RSS_090 = "http://my.netscape.com/rdf/simple/0.9/"
XHTML = "http://www.w3.org/1999/xhtml"
