from typing import Any, Optional

class AVLNode:
    """
    Nó da Árvore AVL.
    Armazena o valor, os filhos e a altura da subárvore em arestas
    (uma folha tem altura 0, uma subárvore vazia vale -1).
    """
    def __init__(self, value: Any):
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 0         # Todo nó nasce como folha

    @staticmethod
    def height_of(node: Optional["AVLNode"]) -> int:
        """Altura armazenada do nó, -1 se a subárvore for vazia (O(1))."""
        if node is None:
            return -1
        return node.height

    def reset_height(self):
        """Recalcula a altura a partir das alturas já corretas dos filhos."""
        self.height = 1 + max(AVLNode.height_of(self.left), AVLNode.height_of(self.right))

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def balance_factor(self) -> int:
        """Altura da esquerda menos altura da direita."""
        return AVLNode.height_of(self.left) - AVLNode.height_of(self.right)

    def __repr__(self):
        return f"AVLNode(value={self.value!r}, height={self.height})"
