from sassvars.oracle.markers import MarkerFactory
from sassvars.oracle.oracle import ValueOracle
from sassvars.oracle.render import LibsassRenderer, Renderer
from sassvars.oracle.scrape import MarkerScraper

__all__ = ["LibsassRenderer", "MarkerFactory", "MarkerScraper", "Renderer", "ValueOracle"]
