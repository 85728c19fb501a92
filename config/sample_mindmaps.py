"""Built-in mind map trees.

``SAMPLE_MINDMAP`` is the fallback shown when the viewer is opened without a
document. The two ``*_TEMPLATE`` trees are what the placeholder generation
step returns for a file and for pasted text.
"""

SAMPLE_MINDMAP = {
    "title": "Sample Mind Map",
    "nodes": [
        {
            "id": "root",
            "text": "Central Topic",
            "children": [
                {
                    "id": "1",
                    "text": "Branch 1",
                    "children": [
                        {"id": "1.1", "text": "Leaf A", "children": []},
                        {"id": "1.2", "text": "Leaf B", "children": []},
                    ],
                },
                {
                    "id": "2",
                    "text": "Branch 2",
                    "children": [
                        {"id": "2.1", "text": "Leaf C", "children": []},
                    ],
                },
            ],
        }
    ],
}

FILE_MINDMAP_TEMPLATE = {
    "title": "",
    "nodes": [
        {
            "id": "root",
            "text": "Main Topic",
            "children": [
                {
                    "id": "1",
                    "text": "Subtopic 1",
                    "children": [
                        {"id": "1.1", "text": "Detail A", "children": []},
                        {"id": "1.2", "text": "Detail B", "children": []},
                    ],
                },
                {
                    "id": "2",
                    "text": "Subtopic 2",
                    "children": [
                        {"id": "2.1", "text": "Detail C", "children": []},
                        {"id": "2.2", "text": "Detail D", "children": []},
                    ],
                },
            ],
        }
    ],
}

TEXT_MINDMAP_TEMPLATE = {
    "title": "Generated Mind Map",
    "nodes": [
        {
            "id": "root",
            "text": "Main Concept",
            "children": [
                {
                    "id": "1",
                    "text": "Key Point 1",
                    "children": [
                        {"id": "1.1", "text": "Supporting Idea A", "children": []},
                        {"id": "1.2", "text": "Supporting Idea B", "children": []},
                    ],
                },
                {
                    "id": "2",
                    "text": "Key Point 2",
                    "children": [
                        {"id": "2.1", "text": "Supporting Idea C", "children": []},
                        {"id": "2.2", "text": "Supporting Idea D", "children": []},
                    ],
                },
            ],
        }
    ],
}
