import unittest

from camera import PerspectiveCamera
from hud import HUDPanel, view_summary_lines
from interaction import InteractionController
from message_panel import MessagePanel
from message_service import MessageService
from mol2_molecule import Mol2Atom, Mol2Molecule
from x11view.svg_canvas import SVGCanvas


class TestHUD(unittest.TestCase):
    def setUp(self):
        self.controller = InteractionController(PerspectiveCamera())
        self.molecule = Mol2Molecule(name="water")
        self.molecule.add_atom(Mol2Atom("1", "O1", 0, 0, 0, "O.3"))

    def test_summary_lines(self):
        lines = view_summary_lines("water", self.molecule, self.controller)
        self.assertEqual(lines[0], "water")
        self.assertEqual(lines[1], "Atoms: 1  Bonds: 0")
        self.assertEqual(lines[2], "Zoom: 1.00  [auto-rotate]")

        self.controller.pointer_down(0, 0)
        self.assertIn("[dragging]", view_summary_lines("water", None, self.controller)[-1])

    def test_first_line_drawn_highest(self):
        canvas = SVGCanvas(200, 200)
        hud = HUDPanel({"y_offset": 20, "line_spacing": 10})
        hud.update_lines(["top", "bottom"])
        hud.draw(canvas)
        svg = canvas.flush()
        self.assertIn('y="180"', svg.split("bottom")[0].rsplit("<text", 1)[1])
        self.assertIn('y="170"', svg.split(">top<")[0].rsplit("<text", 1)[1])

    def test_message_panel_draws_recent_messages(self):
        service = MessageService(max_messages=2)
        service.log_info("first")
        service.log_info("second")
        service.log_error("third")
        canvas = SVGCanvas(300, 200)
        MessagePanel(service).draw(canvas)
        svg = canvas.flush()
        self.assertNotIn("first", svg)
        self.assertIn("second", svg)
        self.assertIn("ERROR: third", svg)

    def test_message_panel_empty(self):
        canvas = SVGCanvas(300, 200)
        MessagePanel(MessageService()).draw(canvas)
        self.assertNotIn("<text", canvas.flush())


if __name__ == "__main__":
    unittest.main()
